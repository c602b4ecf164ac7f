"""Protean Engine runner for the Lenscart domains.

Events handled inside their own domain run synchronously on the request
path. Events that cross domains only travel through the event store: the
Catalogue stock withdrawal after an order, the Ordering stock snapshot fed
by product changes, and the customer notifications about orders. The
engine subscribes to those streams and must run next to the web app.

Usage:
    python src/server.py                     # Run all domain engines
    python src/server.py --domain catalogue  # Run only the catalogue engine
"""

import argparse
import asyncio

from protean.server.engine import Engine

DOMAIN_NAMES = ["catalogue", "ordering", "messaging"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "catalogue":
        from catalogue.domain import catalogue as domain
    elif name == "ordering":
        from ordering.domain import ordering as domain
    elif name == "messaging":
        from messaging.domain import messaging as domain
    else:
        raise ValueError(f"Unknown domain: {name}")

    domain.init()
    return domain


async def run(domain_names):
    engines = [Engine(_get_domain(name)) for name in domain_names]
    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Lenscart Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    asyncio.run(run([args.domain] if args.domain else DOMAIN_NAMES))


if __name__ == "__main__":
    main()
