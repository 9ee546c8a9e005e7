"""Local 2D frames of the six faces of a wall."""

from __future__ import annotations

from wallgeom.models import Wall, FaceType, FaceFrame, Point2D, Vector2D, Vector3D


def _plan_normal_to_world(v: Vector2D) -> Vector3D:
    return Vector3D(x=v.x, y=0.0, z=-v.y)


def face_frame(wall: Wall, face_type: FaceType) -> FaceFrame:
    """
    Frame of one face.

    Front/back run along the wall length, left/right (start/end caps) across
    the thickness; both measure height upward from the floor. Top/bottom span
    the footprint rectangle. Every frame is right-handed about its outward
    normal, so a counter-clockwise local ring faces outward in the world.
    """
    d = wall.direction
    n = wall.normal
    half = wall.thickness / 2

    if face_type == FaceType.FRONT:
        origin, axis, outward, width = wall.end.offset(n, half), -d, n, wall.length
    elif face_type == FaceType.BACK:
        origin, axis, outward, width = wall.start.offset(n, -half), d, -n, wall.length
    elif face_type == FaceType.LEFT:
        origin, axis, outward, width = wall.start.offset(n, half), -n, -d, wall.thickness
    elif face_type == FaceType.RIGHT:
        origin, axis, outward, width = wall.end.offset(n, -half), n, d, wall.thickness
    else:
        top = face_type == FaceType.TOP
        return FaceFrame(
            face_type=face_type,
            origin=wall.start.offset(n, -half if top else half),
            width_axis=d,
            depth_axis=n if top else -n,
            width=wall.length,
            height=wall.thickness,
            elevation=wall.height if top else 0.0,
            normal=Vector3D(x=0.0, y=1.0 if top else -1.0, z=0.0),
        )

    return FaceFrame(
        face_type=face_type,
        origin=origin,
        width_axis=axis,
        depth_axis=outward,
        width=width,
        height=wall.height,
        normal=_plan_normal_to_world(outward),
    )


def face_line(frame: FaceFrame) -> tuple[Point2D, Point2D]:
    """Plan segment carrying a vertical face."""
    return frame.origin, frame.origin.offset(frame.width_axis, frame.width)
