from models.point import Point
from builders.tree_builder import TreeBuilder, build_tree
from painter.painters_view import paint
from utils.scenes import get_scene
from visualization.save_outputs import save_all_outputs

from config import (
    OUTPUT_FOLDER,
    get_active_params,
)


def process_scene(scene_name: str, builder_name: str, viewpoint: Point):
    """
    Runs the complete pipeline for one scene:
      1. Scene creation
      2. BSP tree construction with the selected builder
      3. Painter's algorithm from the viewpoint
      4. Save outputs (tree, view)
    """

    print(f"\n=== Processing scene: {scene_name} ===")
    params = get_active_params()

    # ------------------------------
    # STEP 1 — SCENE
    # ------------------------------
    scene = get_scene(scene_name)
    if not scene.segments:
        print(f"[WARN] Scene {scene_name} has no segments. Skipping.")
        return

    # ------------------------------
    # STEP 2 — BSP TREE
    # ------------------------------
    builder = TreeBuilder.from_display_name(builder_name)
    root = build_tree(scene.segments, builder, tau=params["TELLER_TAU"])
    print(
        f"{builder} tree: {len(scene.segments)} segments, size {root.size()}, "
        f"height {root.height()}, {root.segment_count()} fragments"
    )

    # ------------------------------
    # STEP 3 — PAINTER'S VIEW
    # ------------------------------
    view = paint(root, viewpoint)
    print(f"View from {viewpoint}: {len(view)} angular segments")

    # ------------------------------
    # STEP 4 — SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=OUTPUT_FOLDER,
        name=f"{scene.name}_{builder.name.lower()}",
        scene=scene,
        root=root,
        view=view,
        viewpoint=viewpoint,
    )

    print(f"[OK] Finished {scene_name}")


def main():
    """
    Main entry point:
      - Reads the demo selection from config
      - Builds, paints and saves one scene
    """
    params = get_active_params()

    try:
        builder_name = TreeBuilder.from_display_name(params["DEMO_BUILDER"]).display_name
    except ValueError:
        print(f"[ERROR] Unknown builder: {params['DEMO_BUILDER']} "
              f"(expected one of {TreeBuilder.display_names()})")
        return

    process_scene(params["DEMO_SCENE"], builder_name, Point(*params["DEMO_VIEWPOINT"]))

    print("\n=== Done ===")


if __name__ == "__main__":
    main()
