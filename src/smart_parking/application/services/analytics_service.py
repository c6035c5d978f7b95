from typing import Dict

from smart_parking.application.services.parking_service import ParkingFacility
from smart_parking.domain.common import VehicleType
from smart_parking.schemas.parking import ParkingAnalytics


class AnalyticsService:
    def __init__(self, facility: ParkingFacility):
        self.facility = facility

    def get_total_revenue(self) -> float:
        return self.facility.total_revenue

    def get_revenue_by_vehicle_type(self) -> Dict[VehicleType, float]:
        revenue = {vehicle_type: 0.0 for vehicle_type in VehicleType}
        for ticket in self.facility.get_ticket_history():
            revenue[ticket.vehicle_type] += ticket.amount_paid or 0.0
        return revenue

    def get_average_duration_hours(self) -> float:
        closed = self.facility.get_ticket_history()
        if not closed:
            return 0.0
        return round(sum(ticket.duration_hours() for ticket in closed) / len(closed), 2)

    def get_current_vehicle_count(self) -> int:
        return self.facility.ticket_repo.count_active()

    def get_floor_distribution(self) -> Dict[int, int]:
        return {floor.number: floor.occupancy_counts()[0] for floor in self.facility.floors}

    def get_parking_analytics(self) -> ParkingAnalytics:
        return ParkingAnalytics(
            total_revenue=round(self.get_total_revenue(), 2),
            revenue_by_vehicle_type=self.get_revenue_by_vehicle_type(),
            tickets_issued=self.facility.tickets_issued,
            tickets_closed=len(self.facility.get_ticket_history()),
            average_duration_hours=self.get_average_duration_hours(),
            current_occupancy=self.get_current_vehicle_count(),
            floor_distribution=self.get_floor_distribution(),
        )
