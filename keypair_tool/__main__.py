from keypair_tool.main import main

main()
