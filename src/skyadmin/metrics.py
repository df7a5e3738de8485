from prometheus_client import Counter

employee_login_total = Counter(
    "skyadmin_employee_login_total",
    "Number of employee login attempts",
    ["outcome"],
)

employee_created_total = Counter(
    "skyadmin_employee_created_total",
    "Number of employee accounts created"
)

audit_fill_total = Counter(
    "skyadmin_audit_fill_total",
    "Number of write operations whose audit fields were filled",
    ["operation"],
)

audit_fill_failures_total = Counter(
    "skyadmin_audit_fill_failures_total",
    "Number of write operations whose audit fields could not be filled",
    ["operation", "entity"],
)
