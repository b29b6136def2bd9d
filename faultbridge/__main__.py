from faultbridge.cli import main

main()
