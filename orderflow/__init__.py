"""orderflow - Root Package.

SOLID principles and Gang-of-Four design patterns applied to a toy
order-processing domain.

Key Components:
    - domain: Order aggregate, payment contracts, pricing and account rules
    - application: Coordinators (facade, proxy, template method, observer)
    - infrastructure: Simulated providers, adapters, storage and logging
    - config: Configuration schemas, loading and management
    - cli: Command line scenarios

Architecture:
    Coordinators depend on ports defined in the domain layer; concrete
    collaborators are wired once in bootstrap.Application.
"""

__version__ = "1.0.0"
__author__ = "orderflow maintainers"
