from miniftp.main import main

main()
