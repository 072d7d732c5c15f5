from projectilelab.app import main

raise SystemExit(main())
