
# Demo invoices inserted into an empty database so the dashboard has data on first run
DEMO_INVOICES = [
    {
        "supplier": "Aurora Marketing",
        "invoice_number": "AM-9021",
        "issue_date": "2024-11-01",
        "due_date": "2024-11-30",
        "amount": 3100,
        "status": "Overdue",
        "category": "Marketing",
        "source": "Upload",
        "week_label": "Week of 02 Dec – 08 Dec",
    },
    {
        "supplier": "Northwind Utilities",
        "invoice_number": "NW-1120",
        "issue_date": "2024-10-18",
        "due_date": "2024-12-05",
        "amount": 860,
        "status": "Overdue",
        "category": "Utilities",
        "source": "Upload",
        "week_label": "Week of 02 Dec – 08 Dec",
    },
    {
        "supplier": "BrightHire",
        "invoice_number": "BH-2221",
        "issue_date": "2024-11-12",
        "due_date": "2024-12-06",
        "amount": 1840,
        "status": "Due soon",
        "category": "Staff",
        "source": "Email",
        "week_label": "Week of 02 Dec – 08 Dec",
    },
    {
        "supplier": "CloudNova",
        "invoice_number": "CN-3488",
        "issue_date": "2024-11-05",
        "due_date": "2024-12-04",
        "amount": 1200,
        "status": "Upcoming",
        "category": "Software",
        "source": "Email",
        "week_label": "Week of 02 Dec – 08 Dec",
    },
    {
        "supplier": "Streamline Legal",
        "invoice_number": "SL-5099",
        "issue_date": "2024-11-08",
        "due_date": "2024-12-08",
        "amount": 950,
        "status": "Upcoming",
        "category": "Other",
        "source": "Upload",
        "week_label": "Week of 02 Dec – 08 Dec",
    },
    {
        "supplier": "Harbor Office",
        "invoice_number": "HO-7782",
        "issue_date": "2024-10-25",
        "due_date": "2024-12-10",
        "amount": 640,
        "status": "Paid",
        "category": "Rent",
        "source": "Email",
        "week_label": "Week of 09 Dec – 15 Dec",
    },
    {
        "supplier": "PixelOps Design",
        "invoice_number": "PO-1199",
        "issue_date": "2024-11-15",
        "due_date": "2024-12-14",
        "amount": 1200,
        "status": "Upcoming",
        "category": "Marketing",
        "source": "Upload",
        "week_label": "Week of 09 Dec – 15 Dec",
    },
    {
        "supplier": "Supplier X",
        "invoice_number": "SX-3301",
        "issue_date": "2024-11-10",
        "due_date": "2024-12-14",
        "amount": 3200,
        "status": "Due soon",
        "category": "Other",
        "source": "Upload",
        "week_label": "Week of 09 Dec – 15 Dec",
    },
    {
        "supplier": "ClearLine Telecom",
        "invoice_number": "CT-5543",
        "issue_date": "2024-11-09",
        "due_date": "2024-12-09",
        "amount": 480,
        "status": "Upcoming",
        "category": "Utilities",
        "source": "Email",
        "week_label": "Week of 02 Dec – 08 Dec",
    },
    {
        "supplier": "Lumina Analytics",
        "invoice_number": "LA-6611",
        "issue_date": "2024-11-05",
        "due_date": "2024-12-12",
        "amount": 2100,
        "status": "Upcoming",
        "category": "Software",
        "source": "Email",
        "week_label": "Week of 09 Dec – 15 Dec",
    },
]
