"""
Seed script for the StorePay development database.
Run with: python -m scripts.seed_data
"""

import sys
from datetime import date, timedelta

from storepay.db.database import Base, SessionLocal, engine
from storepay.db.models.stores import Stores
from storepay.db.models.employees import Employees
from storepay.db.models.weekly_templates import WeeklyTemplates
from storepay.db.models.schedule_exceptions import ScheduleExceptions, ScheduleExceptionType
from storepay.services.payroll import calculate_payroll
from storepay.services.payroll.periods import week_bounds


LUNCH = [{"start": "12:00", "end": "13:00", "name": "lunch"}]
WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday"]


def reset_tables():
    """Drop and recreate every table."""
    print("Resetting tables...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("All tables recreated.")


def seed_stores(db):
    """Seed 2 stores."""
    print("Seeding stores...")

    stores = [
        Stores(id=1, name="Gangnam Cafe", time_slot_minutes=30),
        Stores(id=2, name="Hongdae Pub", time_slot_minutes=30),
    ]

    for store in stores:
        db.add(store)
    db.commit()
    print(f"Seeded {len(stores)} stores.")


def seed_employees(db):
    """Seed full-timers, part-timers and one night worker."""
    print("Seeding employees...")

    employees = [
        # Gangnam Cafe
        Employees(id=1, store_id=1, name="Kim Minji", position="Manager", hourly_wage=12000,
                  start_date=date(2023, 3, 1)),
        Employees(id=2, store_id=1, name="Lee Jun", position="Barista", hourly_wage=10030,
                  start_date=date(2024, 6, 15)),
        Employees(id=3, store_id=1, name="Park Seoyeon", position="Barista", hourly_wage=10030,
                  start_date=date(2024, 9, 1)),
        # Hongdae Pub
        Employees(id=4, store_id=2, name="Choi Yuna", position="Manager", hourly_wage=13000,
                  start_date=date(2022, 11, 1)),
        Employees(id=5, store_id=2, name="Jung Hoseok", position="Server", hourly_wage=10500,
                  start_date=date(2024, 2, 1)),
        Employees(id=6, store_id=2, name="Kang Daniel", position="Server", hourly_wage=10030,
                  start_date=date(2025, 1, 2), is_active=False),
    ]

    for employee in employees:
        db.add(employee)
    db.commit()
    print(f"Seeded {len(employees)} employees.")


def seed_weekly_templates(db):
    """One active template per store."""
    print("Seeding weekly templates...")

    cafe = {}
    for index, day in enumerate(WEEKDAYS):
        staff = {"1": {"start_time": "09:00", "end_time": "18:00"}}
        # part-timers split the afternoons, one above and one below the holiday-pay threshold
        if index < 4:
            staff["2"] = {"start_time": "13:00", "end_time": "17:00"}
        if index in (0, 2, 4):
            staff["3"] = {"start_time": "14:00", "end_time": "18:00"}
        cafe[day] = {"is_open": True, "break_periods": LUNCH, "employees": staff}
    cafe["saturday"] = {"is_open": False, "employees": {}}
    cafe["sunday"] = {"is_open": False, "employees": {}}

    pub = {}
    for day in ["wednesday", "thursday", "friday", "saturday"]:
        pub[day] = {
            "is_open": True,
            "break_periods": [{"start": "01:00", "end": "01:30", "name": "night break"}],
            "employees": {
                "4": {"start_time": "18:00", "end_time": "02:00"},
                "5": {"start_time": "21:00", "end_time": "05:00"},
            },
        }

    templates = [
        WeeklyTemplates(id=1, store_id=1, template_name="Cafe weekdays", schedule_data=cafe),
        WeeklyTemplates(id=2, store_id=2, template_name="Pub nights", schedule_data=pub),
    ]

    for template in templates:
        db.add(template)
    db.commit()
    print(f"Seeded {len(templates)} weekly templates.")


def seed_schedule_exceptions(db, week_start: date):
    """A few exceptions in the current week."""
    print("Seeding schedule exceptions...")

    monday = week_start + timedelta(days=1)
    exceptions = [
        ScheduleExceptions(store_id=1, employee_id=2, template_id=1, work_date=monday,
                           exception_type=ScheduleExceptionType.CANCEL, notes="Sick leave"),
        ScheduleExceptions(store_id=1, employee_id=1, template_id=1, work_date=monday + timedelta(days=5),
                           exception_type=ScheduleExceptionType.EXTRA, start_time="10:00", end_time="15:00",
                           notes="Saturday inventory"),
        ScheduleExceptions(store_id=2, employee_id=5, template_id=2, work_date=monday + timedelta(days=3),
                           exception_type=ScheduleExceptionType.OVERRIDE, start_time="20:00", end_time="06:00"),
    ]

    for exception in exceptions:
        db.add(exception)
    db.commit()
    print(f"Seeded {len(exceptions)} schedule exceptions.")


def print_payroll_summary(db, week_start: date, week_end: date):
    stores, totals = calculate_payroll(db, [1, 2], week_start, week_end)

    print(f"\nPayroll {week_start} .. {week_end}")
    for store in stores:
        print(f"  {store.store.name} ({store.template_name})")
        for data in store.payroll_data:
            holiday = "holiday pay" if data.is_eligible_for_holiday_pay else "no holiday pay"
            print(f"    {data.employee.name:<14} {data.weekly_hours:>6}h  {data.total_pay:>10,} KRW  {holiday}")
    print(f"  Grand total: {totals.total_employees} employees, {totals.total_pay:,} KRW")


def main():
    """Main seed function."""
    print("\n" + "="*50)
    print("StorePay Database Seeder")
    print("="*50 + "\n")

    # Confirmation prompt
    response = input("This will DELETE ALL EXISTING DATA. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Aborted.")
        sys.exit(0)

    reset_tables()
    db = SessionLocal()
    week_start, week_end = week_bounds(date.today())

    try:
        # Seed in dependency order
        seed_stores(db)
        seed_employees(db)
        seed_weekly_templates(db)
        seed_schedule_exceptions(db, week_start)

        print_payroll_summary(db, week_start, week_end)

        print("\n" + "="*50)
        print("Seeding complete!")
        print("="*50 + "\n")

    except Exception as e:
        db.rollback()
        print(f"\nError during seeding: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
