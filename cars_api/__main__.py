from cars_api.app import main

main()
