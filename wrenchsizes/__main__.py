from wrenchsizes.cli import main

raise SystemExit(main())
