"""Hour Bank package.

Employee time tracking: clock punches, monthly timesheet, overtime/delay
arithmetic and the monthly hour-bank balance. Organized by feature modules
(timesheet, balance, employees, ...) with a thin Flask controller layer over
service/repository layers.
"""
