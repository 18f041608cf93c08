from portfolio_api.server import main

main()
