class KnapEvoError(Exception):
    """Base for all knapevo exceptions."""

    pass


# High-level families
class ValidationError(KnapEvoError):
    """Data validation failures."""

    pass


class EvolutionError(KnapEvoError):
    """Evolution process failures."""

    pass


# Validation subtypes
class ConfigurationError(ValidationError):
    """Invalid run configuration or problem definition."""

    pass


# Evolution subtypes
class DegeneratePopulationError(EvolutionError):
    """Raised when every individual in a population has zero fitness."""

    pass
