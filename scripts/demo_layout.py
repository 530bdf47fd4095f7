import subprocess
from pathlib import Path
from src.graph.layout import calculate_graph_layout, graph_width
from src.graph.models import CommitRef

SAMPLE_HISTORY = [
    CommitRef("m2", ["f2", "h1"]),
    CommitRef("h1", ["f1"]),
    CommitRef("f2", ["m1"]),
    CommitRef("m1", ["b1", "f1"]),
    CommitRef("f1", ["b1"]),
    CommitRef("b1", []),
]

def read_git_log(limit: int = 40):
    """Reads `git log` output as newest-first CommitRefs."""
    proc = subprocess.run(
        ["git", "log", "--format=%H %P", "-n", str(limit)],
        capture_output=True,
        check=True,
    )
    commits = []
    for line in proc.stdout.decode().splitlines():
        oid, *parents = line.split()
        commits.append(CommitRef(oid, parents))
    return commits

def main():
    if Path(".git").exists():
        print("Reading git log...")
        commits = read_git_log()
    else:
        print("No .git directory found, using the sample history.")
        commits = SAMPLE_HISTORY

    layout = calculate_graph_layout(commits)
    print(f"Laid out {len(layout.nodes)} commits, {len(layout.edges)} edges, "
          f"{layout.max_lane + 1} lane(s), {graph_width(layout)}px wide.\n")

    for node in layout.nodes:
        cells = ["."] * (layout.max_lane + 1)
        cells[node.lane] = "*"
        parents = " ".join(p[:7] for p in node.parent_ids)
        print(f"{' '.join(cells)}  {node.commit_id[:7]} ({parents})")

if __name__ == "__main__":
    main()
