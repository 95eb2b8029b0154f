from dropfour.main import main

raise SystemExit(main())
