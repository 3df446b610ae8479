from budget_tracker.cli import main

raise SystemExit(main())
