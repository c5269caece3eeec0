# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # 02 — Running a Barrier Stack from YAML
#
# The same kind of nested stack as example 01, described in
# `barrier_stack.yaml` instead of code.

# %%
from pathlib import Path

from pybarrier import io, time, postprocess
from pybarrier.logging_config import setup_logging

setup_logging()

# %% [markdown]
# ## 1. Load

# %%
cfg = io.load_config(Path(__file__).with_name("barrier_stack.yaml"))
tree = io.build_tree(cfg)
print(tree)

# %% [markdown]
# ## 2. Run and Report

# %%
tree.run(time.Stepper(t_end=240, dt=1))
for iso, kg in sorted(postprocess.inventory_by_isotope(tree).items()):
    print(f"{iso}: {kg:.4f} kg")
print(postprocess.mass_balance(tree))
