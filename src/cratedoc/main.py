import sys
from cratedoc.cli import main as cli_main

def main():
    sys.exit(cli_main())

if __name__ == "__main__":
    main()
