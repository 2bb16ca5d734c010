from pytimetransform.cli import main

main()
