from .check_version import main

main()
