"""Launch the Paint Calculator with `python -m paintestimator`."""
from paintestimator.main import main

if __name__ == "__main__":
    main()
