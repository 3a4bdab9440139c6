"""Allow running the package with ``python -m solid_orders``."""

from solid_orders.main import main

if __name__ == "__main__":
    raise SystemExit(main())
