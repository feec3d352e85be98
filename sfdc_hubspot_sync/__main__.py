from sfdc_hubspot_sync.cli import main

raise SystemExit(main())
