"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.metrics.booking_metrics import metrics
from src.service.seat_booking.driven_adapter.repo.seat_store_sqlalchemy_impl import (
    SeatStoreSqlalchemyImpl,
)
from src.service.seat_booking.driven_adapter.state.in_memory_seat_store import InMemorySeatStore


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (only touched when SEAT_STORE_BACKEND=database)
    database = providers.Singleton(Database)

    # Prometheus collectors are process-global
    booking_metrics = providers.Object(metrics)

    # Authoritative seat store, chosen by SEAT_STORE_BACKEND
    seat_store = providers.Selector(
        config_service.provided.SEAT_STORE_BACKEND,
        memory=providers.Singleton(
            InMemorySeatStore,
            total_seats=config_service.provided.TOTAL_SEATS,
            seats_per_row=config_service.provided.SEATS_PER_ROW,
        ),
        database=providers.Singleton(
            SeatStoreSqlalchemyImpl,
            session_factory=database.provided.session,
            total_seats=config_service.provided.TOTAL_SEATS,
            seats_per_row=config_service.provided.SEATS_PER_ROW,
        ),
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
