"""python -m deck_of_cards 入口"""

from deck_of_cards.ui.cli import main

if __name__ == "__main__":
    main()
