"""Route tokens passed to the navigation callback."""

ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}
