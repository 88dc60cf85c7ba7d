from pkgprobe.cli import main

main()
