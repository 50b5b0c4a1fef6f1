# bistro

A small restaurant service that keeps three views of one restaurant apart
while they share a single SQLite database:

- **Kitchen** — dishes with their station (`grill`, `sauce`, `cold`,
  `pastry`), cooking method and prep time, and *fire orders*: a table's
  dishes, each fired and then plated. When every line of an order is plated,
  the whole order is plated.
- **Floor** — tables, seatings (walk-ins and reservations), menu items with
  prices and availability, and the number of covers seated today (UTC date).
- **Finance** — cost items with ingredient, supplier and selling prices,
  margins, waste records and the overall food-cost ratio.

Dishes, menu items and cost items are rows of the same `items` table; each
part reads and writes only its own columns.

The parts talk through an in-process `EventBus`. When the kitchen marks a
dish out of stock, the floor marks the menu item of the same name as sold
out (if there is one).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The database schema

The package does not ship a schema. On start-up the `bistro` command runs
the SQL in `db/schema.sql`, relative to the current directory, and stops with
an error if that file cannot be read. The file must create the tables and
columns the repositories use, for example:

```sql
CREATE TABLE IF NOT EXISTS items (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    price_cents INTEGER,
    prep_time_minutes INTEGER,
    cooking_method TEXT,
    station TEXT,
    ingredient_cost_cents INTEGER,
    supplier_price_cents INTEGER,
    is_available INTEGER
);
CREATE TABLE IF NOT EXISTS tables (
    id TEXT PRIMARY KEY, table_number INTEGER, capacity INTEGER, status TEXT
);
CREATE TABLE IF NOT EXISTS seatings (
    id TEXT PRIMARY KEY, table_id TEXT, cover_count INTEGER, is_walk_in INTEGER,
    reservation_name TEXT, seated_at TEXT, cleared_at TEXT
);
CREATE TABLE IF NOT EXISTS orders (
    id TEXT PRIMARY KEY, table_number INTEGER, status TEXT, created_at TEXT
);
CREATE TABLE IF NOT EXISTS order_lines (
    id TEXT PRIMARY KEY, order_id TEXT, item_id TEXT, status TEXT,
    fire_at_offset_minutes INTEGER, fired_at TEXT, plated_at TEXT
);
CREATE TABLE IF NOT EXISTS waste_records (
    id TEXT PRIMARY KEY, item_id TEXT, quantity REAL, unit TEXT,
    reason TEXT, recorded_at TEXT
);
```

`Database` opens the file in WAL mode with foreign keys switched on, so any
foreign keys the schema declares are enforced.

## Running the server

```
bistro
```

Options:

- `--db PATH` — the SQLite database file (default `restaurant.db`)
- `--port PORT` — the port to listen on (default `8082`)

Other arguments are ignored. The server uses Flask's built-in server and
listens on all interfaces. For example:

```
bistro --db /tmp/tonight.db --port 9000
```

## HTTP endpoints

All request and response bodies are JSON. A successful creation answers with
201 and the new `id`. A malformed body or a broken business rule (seating an
occupied table, plating a dish that was never fired) answers with 422 and an
`error` message. An unknown id answers with 404, except on the fire and
plate routes, which answer every failure with 422.

### Kitchen — `/api/kitchen`

| Method | Path | Body |
|---|---|---|
| GET | `/api/kitchen/dishes` | |
| POST | `/api/kitchen/dishes` | `name`, `prepTimeMinutes`, `cookingMethod`, `station` |
| POST | `/api/kitchen/dishes/<id>/out-of-stock` | |
| POST | `/api/kitchen/dishes/<id>/restore` | |
| GET | `/api/kitchen/fire-orders` | |
| POST | `/api/kitchen/fire-orders` | `tableNumber`, `dishes`: list of `{dishId, fireAtOffsetMinutes}` |
| GET | `/api/kitchen/fire-orders/<id>` | |
| POST | `/api/kitchen/fire-orders/<id>/lines/<lineId>/fire` | |
| POST | `/api/kitchen/fire-orders/<id>/lines/<lineId>/plate` | |

The dish list holds only items that have both a station and a cooking method.

### Floor — `/api/floor`

| Method | Path | Body |
|---|---|---|
| GET | `/api/floor/tables` | |
| POST | `/api/floor/tables` | `table_number`, `capacity` |
| POST | `/api/floor/tables/<id>/seat-walk-in` | `party_size` |
| POST | `/api/floor/tables/<id>/seat-reservation` | `party_size`, `reservation_name` |
| POST | `/api/floor/tables/<id>/turn` | |
| GET | `/api/floor/menu-items` | |
| POST | `/api/floor/menu-items` | `name`, `description`, `price_cents` |
| PUT | `/api/floor/menu-items/<id>` | `name`, `description`, `price_cents` |
| POST | `/api/floor/menu-items/<id>/sold-out` | |
| GET | `/api/floor/covers/tonight` | |

### Finance — `/api/finance`

| Method | Path | Body |
|---|---|---|
| GET | `/api/finance/cost-items` | |
| POST | `/api/finance/cost-items` | `name`, `ingredient_cost_cents`, `supplier_price_cents`, `selling_price_cents` |
| PUT | `/api/finance/cost-items/<id>` | `ingredient_cost_cents`, `supplier_price_cents` |
| GET | `/api/finance/cost-items/<id>/margin` | |
| GET | `/api/finance/waste` | |
| POST | `/api/finance/waste` | `cost_item_id`, `quantity`, `unit`, `reason` |
| GET | `/api/finance/reports/food-cost-ratio` | |

## Using it from Python

`bistro.app.create_app(database, bus=None)` builds the three services over an
open `Database` and returns a Flask application:

```python
from bistro.app import create_app
from bistro.shared.db import Database
from bistro.shared.events import EventBus

with Database("restaurant.db") as database:
    database.execute_file("db/schema.sql")
    app = create_app(database, EventBus())
    client = app.test_client()
    response = client.post("/api/floor/tables", json={"table_number": 4, "capacity": 2})
    print(response.status_code, response.get_json())
```

The services — `KitchenService`, `FloorService` and `FinanceService` — can
also be used directly, with `SqliteKitchenRepository`,
`SqliteFloorRepository` and `SqliteFinanceRepository` and any object that has
a `publish(event)` method. They raise `NotFoundError` for unknown ids and
`DomainError` for broken business rules, both from `bistro.shared.types`.