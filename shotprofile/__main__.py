from shotprofile.cli.main import main

raise SystemExit(main())
