"""
Course Core - Quick Start Example

목적지 접근 시나리오: course 계산 + arrival circle / perpendicular 알림
"""
import math
from datetime import datetime, timedelta, timezone

from course_core import (
    ActiveRoute,
    CourseCalculator,
    CourseConfig,
    CourseInputs,
    CourseMonitor,
    GeoPoint,
)


def main():
    print("=" * 60)
    print("Course Core - Quick Start")
    print("=" * 60)

    # 1. 초기화
    config = CourseConfig.from_options({
        'notifications': {'sound': True},
        'calculations': {'method': 'GreatCircle'},
    })
    calculator = CourseCalculator()
    monitor = CourseMonitor(config, sink=lambda n: print(f"  >> {n.to_dict()}"))

    # 2. Route 설정 (적도 위 동쪽으로 1° 간격)
    waypoints = [GeoPoint(0.0, float(lon)) for lon in range(4)]
    route = ActiveRoute(waypoints, point_index=1)
    start = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    print(f"\n[Route] {len(waypoints)} waypoints, next point index={route.point_index}")

    # 3. 선박 위치를 next point 방향으로 이동
    print("\n[Approach]")
    for i, lon in enumerate([0.5, 0.9, 0.998, 1.002]):
        inputs = CourseInputs(
            position=GeoPoint(0.0, lon),
            previous_point=waypoints[0],
            next_point=waypoints[1],
            course_over_ground_true=math.radians(90),
            speed_over_ground=6.0,
            magnetic_variation=math.radians(-3),
            timestamp=start + timedelta(minutes=10 * i),
            target_arrival_time=start + timedelta(hours=12),
            arrival_circle=500,
            active_route=route,
        )
        data = calculator.compute(inputs)
        monitor.update(inputs, data)

        result = monitor.current()
        print(f"pos=({lon:.3f}°E) dist={result.distance:.0f} m "
              f"brg={math.degrees(result.bearing_true):.1f}° (M {math.degrees(result.bearing_magnetic):.1f}°) "
              f"XTE={result.cross_track_error:.1f} m")
        print(f"  TTG={result.time_to_go:.0f} s  ETA={result.estimated_time_of_arrival:%H:%M:%S}  "
              f"route={result.route.distance / 1852:.1f} NM  target speed={result.target_speed:.2f} m/s  "
              f"passed={data.passed_perpendicular}")

    # 4. 목적지 해제 → clear notification
    print("\n[Destination cleared]")
    inputs = CourseInputs(position=GeoPoint(0.0, 1.01))
    monitor.update(inputs, calculator.compute(inputs))

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
