# creature-sighting

A small web application that generates fictional creature sightings and shows
them as HTML pages and through a JSON API. It needs nothing beyond the Python
standard library.

## Installation

```
pip install .
```

## Running the server

```
creature-sighting
```

Options:

| Option         | Default  | Meaning                                      |
|----------------|----------|----------------------------------------------|
| `--host`       | all      | Interface to bind                            |
| `--port`       | `8080`   | Port to listen on                            |
| `--static-dir` | `static` | Directory whose files are served at `/static/` |

At start-up the server registers the `kaiju` generator and stores five sample
sightings whose timestamps lie six hours apart, going back from now. It stops
cleanly on Ctrl+C (SIGINT) or SIGTERM.

## Pages

| Path                  | What it shows                                                  |
|-----------------------|----------------------------------------------------------------|
| `/`                   | Home page (also shown for any path not listed here)            |
| `/sightings`          | Stored sightings, most recently added first; `?category=` filters |
| `/sighting/<id>`      | Detail report for one stored sighting; 404 if it is unknown    |
| `/sighting/random`    | Generates and stores a new sighting, then redirects (303) to its report; `?category=` picks the generator, default `kaiju`, unknown gives 404 |
| `/locations`          | Distinct city/country places of the stored sightings           |
| `/categories`         | Registered creature categories                                 |
| `/static/...`         | Files from the static directory; 404 if missing                |

Requests to `/sighting` and `/static` without the trailing slash are
redirected (301) to the slashed path.

## JSON API

- `GET /api/sighting?category=kaiju` returns one newly generated sighting (it
  is not stored). The category defaults to `kaiju`; an unknown category gives
  status 400. The object has the keys `id`, `name`, `type`, `category`,
  `location` (`latitude`, `longitude`, and `city`, `country`, `region` when
  set), `description`, `timestamp` (ISO 8601) and `attributes` (`size`,
  `behavior`, `height`).
- `GET /api/categories` returns `{"categories": [...]}`.

On the page and API endpoints, any method other than GET gives status 405.

## Using it as a library

```python
from creature_sighting.kaiju import KaijuGenerator
from creature_sighting.sighting import Registry
from creature_sighting.storage import InMemoryStorage

registry = Registry()
registry.register("kaiju", KaijuGenerator())

store = InMemoryStorage()
store.add(registry.get("kaiju").generate())
for sighting in store.all():
    print(sighting.name, sighting.location.city, sighting.to_dict()["attributes"])
```

- `Registry.register` raises `RegistryError` for a category that is already
  taken, and `Registry.get` raises it for an unknown one.
- New creature kinds are added by subclassing `creature_sighting.sighting.Generator`
  and implementing `generate()` and `category()`.
- `InMemoryStorage` offers `add`, `get` (returns `None` when absent), `all`,
  `by_category`, `clear`, `len()` and `generate_initial_sightings(registry)`.
- `creature_sighting.pages` and `creature_sighting.sighting_pages` render the
  HTML pages as strings.
- `creature_sighting.server.Application` is a WSGI application, so any WSGI
  server can host it; `Application.dispatch(request)` takes a
  `creature_sighting.httpkit.Request` and returns a `Response` directly.

## What it does not do

- Sightings live only in memory and are lost when the server stops.
- No static files ship with the package; `/static/` serves whatever is in the
  directory given by `--static-dir`.
- The links on the locations page carry a `location` parameter, but
  `/sightings` filters only by `category`, so those links list every sighting.

## Running the tests

```
pip install .[test]
pytest
```