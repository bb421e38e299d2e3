from imageserver.server import main

main()
