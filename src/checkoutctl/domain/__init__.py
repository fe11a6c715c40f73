"""Domain layer — catalog items, cart, account, and checkout errors.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
