from functool.demo import main

main()
