# river_search/plots/plotting.py
# Bar plots comparing BFS runs across problems: nodes expanded, nodes generated,
# time taken and peak memory. Takes the rows produced by benchmarks.run_all.
from __future__ import annotations
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def bar_compare(rows, title="Search Comparison"):
    names = [r.get("problem", r["algo"]) for r in rows]
    nodes = [r["nodes_expanded"] for r in rows]
    generated = [r["nodes_generated"] for r in rows]
    times = [r["time_s"] for r in rows]
    mems  = [r.get("peak_kb") or 0 for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, generated); axs[1].set_title("Nodes Generated"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
