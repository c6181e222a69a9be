"""Allow ``python -m tripane``."""

from tripane.cli import main

raise SystemExit(main())
