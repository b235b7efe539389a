"""Entry point for ``python -m jsonscope``."""

from jsonscope.cli import main

raise SystemExit(main())
