from .tokenize_cli import main

raise SystemExit(main())
