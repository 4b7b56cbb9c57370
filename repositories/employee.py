from models import ApiResponse, Employee, EmployeeInput


class EmployeeRepository:
    def get_all(self) -> ApiResponse[list[Employee]]:
        raise NotImplementedError  # pragma: no cover

    def get(self, employee_id: str) -> ApiResponse[Employee]:
        raise NotImplementedError  # pragma: no cover

    def create(self, employee: EmployeeInput) -> ApiResponse[Employee]:
        raise NotImplementedError  # pragma: no cover

    def delete(self, name: str) -> ApiResponse[bool]:
        raise NotImplementedError  # pragma: no cover
