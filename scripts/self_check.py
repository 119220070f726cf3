#!/usr/bin/env python3
import importlib, sys, traceback, numpy as np
from pathlib import Path

# --- Ensure the repo root is on sys.path ---
ROOT = Path(__file__).resolve().parent.parent  # repo root = parent of scripts/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OK = "\x1b[92mOK\x1b[0m"
BAD = "\x1b[91mERR\x1b[0m"

def check(name, fn):
    try:
        fn()
        print(f"[{OK}] {name}")
    except Exception as e:
        print(f"[{BAD}] {name}: {e}")
        traceback.print_exc()
        sys.exit(1)

def test_grids():
    gen = importlib.import_module("grids.generator")
    gm = gen.generate_cost_map(20, 20, wall_density=0.3, keep_free=[(0, 0)], rng=np.random.default_rng(0))
    assert gm.cost_map.size == (20, 20)
    assert not gm.cost_map.is_wall((0, 0))

def test_planners():
    from grids.generator import generate_cost_map
    planners = importlib.import_module("planners")
    gm = generate_cost_map(20, 20, wall_density=0.3, keep_free=[(0, 0), (19, 19)], rng=np.random.default_rng(1))
    for topo in ("hex", "square4", "square8"):
        res = planners.get_planner("a_star", topology=topo).plan(gm.cost_map, (0, 0), (19, 19))
        assert isinstance(res, dict) and "success" in res
        res = planners.get_planner("reachability", topology=topo).plan(gm.cost_map, (0, 0), 3)
        assert res["cells"][0] == (0, 0)

def test_metrics():
    m = importlib.import_module("metrics")
    from grids.cost_map import CostMap
    from planners import find_path
    cm = CostMap.create(5, 5, 1)
    path = find_path((0, 0), (4, 4), cm, "square4")
    assert m.compute_path_metrics((0, 0), path, cm, "square4")["valid"]

def test_cli_help():
    import subprocess
    for mod in ["cli.run_query", "cli.run_bench"]:
        r = subprocess.run([sys.executable, "-m", mod, "--help"], cwd=str(ROOT),
                           stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        assert r.returncode == 0, f"{mod} --help failed"

if __name__ == "__main__":
    check("grids", test_grids)
    check("planners", test_planners)
    check("metrics", test_metrics)
    check("CLIs --help", test_cli_help)
    print(f"[{OK}] All self-checks passed.")
