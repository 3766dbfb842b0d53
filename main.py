"""
Entry point script for the term-ai application.
This allows running the app directly from the project root.
"""
from term_ai.main import main

if __name__ == "__main__":
    main()
