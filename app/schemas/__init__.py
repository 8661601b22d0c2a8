from .employee import EmployeeIn, EmployeeOut
from .page import Page, PageRequest
