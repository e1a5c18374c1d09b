from student_tuition.interfaces.cli import main

raise SystemExit(main())
