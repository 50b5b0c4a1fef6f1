"""Wiring of the three contexts into one HTTP server, and its command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from flask import Flask

from bistro.finance.repository import SqliteFinanceRepository
from bistro.finance.service import FinanceService
from bistro.floor.repository import SqliteFloorRepository
from bistro.floor.service import FloorService
from bistro.kitchen.domain import DishMarkedOutOfStock
from bistro.kitchen.repository import SqliteKitchenRepository
from bistro.kitchen.service import KitchenService
from bistro.shared.db import Database
from bistro.shared.events import EventBus
from bistro.shared.types import NotFoundError
from bistro.web.finance_routes import finance_blueprint
from bistro.web.floor_routes import floor_blueprint
from bistro.web.kitchen_routes import kitchen_blueprint

DEFAULT_DB_PATH = "restaurant.db"
DEFAULT_PORT = 8082
SCHEMA_PATH = "db/schema.sql"


@dataclass(frozen=True)
class ServerSettings:
    """Where the database lives and which port the server listens on."""

    db_path: str = DEFAULT_DB_PATH
    port: int = DEFAULT_PORT


def parse_args(argv: Sequence[str]) -> ServerSettings:
    """Read ``--db PATH`` and ``--port N``; anything else is ignored."""
    db_path = DEFAULT_DB_PATH
    port = DEFAULT_PORT
    args = iter(argv)
    for arg in args:
        if arg not in ("--db", "--port"):
            continue
        value = next(args, None)
        if value is None:
            break
        if arg == "--db":
            db_path = value
        else:
            port = int(value)
    return ServerSettings(db_path, port)


def create_app(database: Database, bus: EventBus | None = None) -> Flask:
    """Build the services over ``database`` and serve them over HTTP."""
    bus = bus if bus is not None else EventBus()

    kitchen_service = KitchenService(SqliteKitchenRepository(database), bus)
    floor_service = FloorService(SqliteFloorRepository(database), bus)
    finance_service = FinanceService(SqliteFinanceRepository(database), bus)

    def take_off_menu(event: DishMarkedOutOfStock) -> None:
        try:
            floor_service.mark_sold_out_by_name(event.dish_name)
        except NotFoundError:
            pass

    bus.subscribe(DishMarkedOutOfStock, take_off_menu)

    app = Flask(__name__)
    app.register_blueprint(kitchen_blueprint(kitchen_service))
    app.register_blueprint(floor_blueprint(floor_service))
    app.register_blueprint(finance_blueprint(finance_service))
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Open the database, apply the schema and serve until interrupted."""
    settings = parse_args(sys.argv[1:] if argv is None else argv)
    with Database(settings.db_path) as database:
        database.execute_file(SCHEMA_PATH)
        app = create_app(database, EventBus())

        print(f"Restaurant DDD server starting on port {settings.port}")
        print(f"  Database: {settings.db_path}")
        print("  Endpoints:")
        print("    Kitchen  -> /api/kitchen/*")
        print("    Floor    -> /api/floor/*")
        print("    Finance  -> /api/finance/*")

        app.run(host="0.0.0.0", port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())