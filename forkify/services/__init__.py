"""
Services for Forkify: API client, recipe model, bookmark store, controller.
"""
