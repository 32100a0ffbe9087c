# simulations/__init__.py
"""
Monte Carlo experiments for the box-search repo.

Run the default batch via:
    python -m simulations.run

Run one custom experiment via:
    python -m simulations.compare --rows ... --columns ... --coins ... [--trials ...] [--plot]
"""
