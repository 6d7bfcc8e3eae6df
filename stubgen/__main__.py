from stubgen.cli import main


raise SystemExit(main())
