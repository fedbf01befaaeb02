"""
certificate_core – Domain kernel of the certificate service.

Import path convention::

    from certificate_core.kernel.errors import DomainError
    from certificate_core.kernel.ddd import Entity, ValueObject
    from certificate_core.kernel.predicates import and_, or_, PredicateExpression
    from certificate_core.observability.logging import get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
