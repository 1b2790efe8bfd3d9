from math2d.cli import main

raise SystemExit(main())
