from dataclasses import dataclass


@dataclass
class Employee:
    id: str
    employee_name: str | None = None
    employee_salary: int | None = None
    employee_age: int | None = None
    employee_title: str | None = None
    employee_email: str | None = None


@dataclass
class EmployeeInput:
    name: str
    salary: int
    age: int
    title: str
