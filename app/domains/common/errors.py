class DomainValidationError(ValueError):
    """Una entidad rechazó sus datos"""
