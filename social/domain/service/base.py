"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services receive their collaborators through the constructor and take
    the acting user's id as an explicit argument. They hold no request state.
    """
