import sys
import os

print(f"Python Executable: {sys.executable}")
print(f"Python Version: {sys.version}")
print(f"CWD: {os.getcwd()}")
print("Path:")
for p in sys.path:
    print(f"  {p}")

print("-" * 20)

try:
    import networkx
    print(f"SUCCESS: networkx imported. Version: {networkx.__version__}")
    if hasattr(networkx, "minimum_spanning_arborescence"):
        print("networkx has minimum_spanning_arborescence")
    else:
        print("networkx does NOT have minimum_spanning_arborescence")
except ImportError:
    print("FAILURE: Could not import networkx")

print("-" * 20)
try:
    import igraph
    print(f"SUCCESS: igraph imported. Version: {igraph.__version__}")
    print(f"File: {igraph.__file__}")
except ImportError as e:
    print(f"FAILURE: Could not import igraph (benchmark extra). Error: {e}")
except OSError as e:
    print(f"FAILURE: igraph native library failed to load. Error: {e}")

print("-" * 20)
try:
    import min_arborescence
    print(f"SUCCESS: min_arborescence imported from {min_arborescence.__file__}")
except ImportError as e:
    print(f"FAILURE: Could not import min_arborescence. Error: {e}")
