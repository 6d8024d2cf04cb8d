"""
Run with: python -m deskcalculator
"""
from deskcalculator.main import main

if __name__ == "__main__":
    main()
