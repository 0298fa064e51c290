"""
Allows execution via: python -m user_service --config config.yaml
"""

from user_service.cli import main

if __name__ == "__main__":
    main()
