from bridge_fees.cli import main

raise SystemExit(main())
