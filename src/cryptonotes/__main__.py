from cryptonotes.core import main

main()
