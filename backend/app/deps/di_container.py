"""
Dependency injection container using dependency-injector.
Wires the process-wide services and controllers.
Request-scoped services are built per request from the DB session.
"""

from dependency_injector import containers, providers

from app.services.health_service import HealthService
from app.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Services
    health_service = providers.Singleton(
        HealthService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        from app.core.config import settings

        _container = Container()
        _container.config.from_dict({
            "database_url": settings.DATABASE_URL,
            "summary_recompute_enabled": settings.SUMMARY_RECOMPUTE_ENABLED,
        })
    return _container
