from typing_tug.main import main

main()
