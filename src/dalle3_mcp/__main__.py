from dalle3_mcp.main import main

main()
