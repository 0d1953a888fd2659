import matplotlib

# Headless: GUI tests build real figures without a display.
matplotlib.use("Agg")
