# ErrandRunners cart, delivery pricing and checkout

__version__ = "1.0.0"
