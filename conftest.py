import os
import sys

import matplotlib

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

matplotlib.use("Agg")
