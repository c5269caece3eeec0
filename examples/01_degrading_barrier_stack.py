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
# # 01 — Release from a Stack of Degrading Barriers
#
# A spent-fuel waste form sits inside a waste package, which sits
# inside a bentonite buffer.  Each component degrades at a constant
# fraction per month and releases its contents congruently with that
# degradation.
#
# **Available mass at a component boundary:**
#
# $$M_{avail}(t) = f_{deg}(t) \, M(t), \qquad
#   f_{deg}(t) = \min\left(1, \sum r_{deg} \, \Delta t\right)$$
#
# The package takes the waste form's whole source term, the buffer
# draws from the package with an advective-dispersive (Cauchy) model.
#
# **Model**: `pybarrier.physics.DegradingBarrier`

# %%
import logging

import matplotlib.pyplot as plt
from pybarrier import geometry, materials, physics, coupling, time, postprocess
from pybarrier.logging_config import setup_logging
from pybarrier.visualization import plot_history

setup_logging(level=logging.INFO)

# %% [markdown]
# ## 1. Components
#
# Nested cylinders 4 m long.

# %%
waste_form = physics.DegradingBarrier(
    name="waste_form",
    degradation_rate=0.02,
    bc_kind="SOURCE_TERM",
    geometry=geometry.Geometry(inner_radius=0.0, outer_radius=0.3, length=4.0),
)
package = physics.DegradingBarrier(
    name="package",
    degradation_rate=0.01,
    bc_kind="SOURCE_TERM",
    geometry=geometry.Geometry(inner_radius=0.3, outer_radius=0.35, length=4.0),
)
buffer = physics.DegradingBarrier(
    name="buffer",
    degradation_rate=0.005,
    advective_velocity=1e-11,
    dispersion=materials.bentonite,
    bc_kind="CAUCHY",
    geometry=geometry.Geometry(inner_radius=0.35, outer_radius=1.0, length=4.0),
)

# %% [markdown]
# ## 2. Inventory
#
# One tonne of low-enriched uranium with traces of caesium and iodine.

# %%
waste_form.absorb(
    materials.MaterialLot(
        materials.Composition({92235: 0.04, 92238: 0.95, 55137: 0.006, 53129: 0.004}),
        mass=1000.0,
    )
)

# %% [markdown]
# ## 3. Nesting and Stepping
#
# Ten years of monthly steps.

# %%
tree = coupling.ComponentTree()
tree.add(waste_form)
tree.add(package, daughters=["waste_form"])
tree.add(buffer, daughters=["package"])

tree.run(time.Stepper(t_end=120))

balance = postprocess.mass_balance(tree)
for name, kg in balance.items():
    print(f"{name:>12s}: {kg:10.4f} kg")

# %% [markdown]
# ## 4. Histories

# %%
fig, axes = plt.subplots(1, 2, figsize=(12, 4))
plot_history(package, kind="vec", ax=axes[0], logy=True)
plot_history(buffer, isotopes=[55137, 53129], kind="conc", ax=axes[1])
plt.tight_layout()
plt.show()

# %% [markdown]
# ## 5. Export

# %%
postprocess.export_history_csv(buffer, "buffer_conc.csv")
postprocess.export_params_csv(tree, "params.csv")

# %% [markdown]
# ## Key Takeaways
#
# - Nothing leaves a component before it has degraded; the first
#   release from the waste form reaches the package at month 2.
# - Caesium moves through bentonite faster than iodine: the element
#   table gives it a larger dispersion coefficient.
# - The total contained mass stays at one tonne throughout.
