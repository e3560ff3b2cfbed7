from record_converter.cli import main

raise SystemExit(main())
