"""Real-world test script for the parking allocator."""

from datetime import datetime, timedelta

from parking_allocator.engine import ParkingEngine
from parking_allocator.model import ParkingConfig
from parking_allocator.render import render_snapshot


# 1. Setup Config
engine = ParkingEngine(ParkingConfig(floors=4, slots_per_floor=64))

now = datetime.now()

# 2. Two cars arrive and park
engine.add_entry(now)
engine.add_entry(now + timedelta(seconds=20))
for _ in range(2):
    result = engine.process_entry()
    print(f"Parked car #{result.car_id} on floor {result.floor_number}, slot {result.slot}")

# 3. One car leaves and pays
exit_request = engine.request_exit(now + timedelta(hours=1))
print(f"Cleared floor {exit_request.floor_number}, slot {exit_request.slot}")
print(f"Exit: {engine.process_exit().outcome.value}")

# 4. Evacuate
evacuation = engine.emergency_evacuate()
print(f"Evacuated: {evacuation.evacuated}")  # Should be [2, 1]
print(f"Occupied after evacuation: {engine.total_occupied()}")  # Should be 0

print(render_snapshot(engine.snapshot(), engine.config.log_size))
