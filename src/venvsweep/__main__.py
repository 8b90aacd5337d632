from venvsweep.cli import main

main()
