import secrets


def new_object_id() -> str:
    """Identificador de 24 caracteres hexadecimales (mismo formato que un ObjectId)"""
    return secrets.token_hex(12)
