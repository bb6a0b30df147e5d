from tabbed_notepad.main import main

raise SystemExit(main())
