from glossary_kit.cli import main

raise SystemExit(main())
