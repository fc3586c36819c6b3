from recipe_finder.cli import main

main()
