from wei_amounts.cli import main

main()
