"""Service layer — checkout logic returning ServiceResult.

Services may import from the domain layer and the store.
They must never import from commands or output.
"""
