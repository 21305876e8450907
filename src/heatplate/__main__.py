"""Run with: python -m heatplate"""
from heatplate.main import main

if __name__ == "__main__":
    main()
