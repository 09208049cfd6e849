"""
Errores del Sistema de Inventario.
"""


class InventoryError(Exception):
    pass


class StoreError(InventoryError):
    """
    Falla de una operación contra la base. El mensaje es legible por el usuario.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(StoreError):
    """Falló el listado de registros"""


class MutationError(StoreError):
    """Falló un insert, update o delete"""


class EntryNotFoundError(MutationError):
    """
    El registro no existe (ya eliminado o id inválido)
    """

    def __init__(self, entry_id):
        super().__init__(f"El registro {entry_id} no existe")
        self.entry_id = entry_id


class ValidationError(InventoryError):
    """
    Borrador inválido; errors mapea campo -> mensaje.
    """

    def __init__(self, errors: dict):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = dict(errors)
