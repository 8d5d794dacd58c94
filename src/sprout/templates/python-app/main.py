def main() -> None:
    print("Hello from {{ projectName }}!")


if __name__ == "__main__":
    main()
