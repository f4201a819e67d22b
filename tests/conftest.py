import matplotlib

# Figures are only written to files in the test suite
matplotlib.use("Agg")
