"""Entry point: python -m usdc_trail"""

from usdc_trail.cli import main

raise SystemExit(main())
