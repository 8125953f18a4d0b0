from file_explorer.cli import main

raise SystemExit(main())
