from theme_assets import main

if __name__ == "__main__":
    main()
