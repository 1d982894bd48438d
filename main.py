from kanban_board.app import main


if __name__ == "__main__":
    main()
