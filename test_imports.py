#!/usr/bin/env python3
"""Import every module and run one stroke through a drawing view."""

import sys
import traceback


def test_imports():
    """Import all modules"""
    tests = [
        ("config", lambda: __import__('config')),
        ("core.geometry", lambda: __import__('core.geometry', fromlist=['QuadSegment'])),
        ("core.stroke_path", lambda: __import__('core.stroke_path', fromlist=['StrokePath'])),
        ("core.stroke_tracker", lambda: __import__('core.stroke_tracker', fromlist=['StrokeTracker'])),
        ("core.pointer_events", lambda: __import__('core.pointer_events', fromlist=['PointerEvent'])),
        ("core.repaint", lambda: __import__('core.repaint', fromlist=['RepaintScheduler'])),
        ("modules.pen", lambda: __import__('modules.pen', fromlist=['Pen'])),
        ("modules.canvas", lambda: __import__('modules.canvas', fromlist=['CanvasCompositor'])),
        ("modules.drawing_view", lambda: __import__('modules.drawing_view', fromlist=['DrawingView'])),
        ("utils.display", lambda: __import__('utils.display', fromlist=['scaled_touch_slop'])),
        ("main", lambda: __import__('main')),
    ]

    print("=" * 60)
    print("Module imports")
    print("=" * 60)

    passed = 0
    failed = 0

    for name, import_func in tests:
        try:
            import_func()
            print(f"✓ {name}")
            passed += 1
        except Exception as e:
            print(f"✗ {name}")
            print(f"  error: {e}")
            traceback.print_exc()
            failed += 1

    print("=" * 60)
    print(f"Result: {passed} passed, {failed} failed")
    print("=" * 60)

    return failed == 0


def test_basic_functionality():
    """Draw one stroke and render it"""
    print("\n" + "=" * 60)
    print("Basic drawing")
    print("=" * 60)

    try:
        import numpy as np
        from core.pointer_events import PointerEvent
        from main import build_view

        print("✓ building DrawingView from config...")
        view = build_view()
        view.on_size_changed(320, 240)

        print("✓ drawing a stroke...")
        view.on_touch_event(PointerEvent.down(100, 100))
        view.on_touch_event(PointerEvent.move(150, 120))
        view.on_touch_event(PointerEvent.move(200, 100))
        view.on_touch_event(PointerEvent.up())

        print("✓ rendering...")
        screen = np.zeros((240, 320, 3), dtype=np.uint8)
        if not view.on_draw(screen):
            raise RuntimeError("render produced nothing")

        print("=" * 60)
        print("All basic checks passed")
        print("=" * 60)
        return True

    except Exception as e:
        print(f"✗ basic check failed: {e}")
        traceback.print_exc()
        return False


if __name__ == "__main__":
    success = test_imports() and test_basic_functionality()
    sys.exit(0 if success else 1)
