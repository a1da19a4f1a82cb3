"""Stylesheet embedded in every rendered invoice.

The document must render without network access, so fonts are system stacks
and there are no external resources.
"""

from __future__ import annotations

INVOICE_CSS = """
@page {
  size: A4;
  margin: 0;
}

* {
  box-sizing: border-box;
}

body {
  font-family: -apple-system, BlinkMacSystemFont, 'Helvetica Neue', Arial, sans-serif;
  margin: 0;
  padding: 20px;
  color: #1d1d1f;
  font-size: 13px;
  line-height: 1.4;
  background: #f5f5f7;
}

.invoice {
  width: 210mm;
  max-width: 210mm;
  margin: 0 auto;
  padding: 20mm;
  background: #ffffff;
  border-radius: 8px;
}

.top-header {
  display: flex;
  justify-content: space-between;
  align-items: flex-start;
  margin-bottom: 40px;
}

.company-title h1 {
  margin: 0 0 8px 0;
  font-size: 32px;
  font-weight: 600;
  line-height: 1.1;
}

.invoice-number {
  font-size: 18px;
  color: #666666;
}

.invoice-dates {
  display: flex;
  flex-direction: column;
  gap: 16px;
  text-align: right;
}

.date-label {
  font-size: 14px;
  font-weight: 500;
  color: #666666;
  margin-bottom: 4px;
}

.date-value {
  font-size: 18px;
  font-weight: 600;
}

.due-date .date-value {
  color: #007aff;
}

.from-to-section {
  display: flex;
  justify-content: space-between;
  gap: 60px;
  margin-bottom: 48px;
}

.bill-to-column,
.from-column {
  flex: 1;
  max-width: 45%;
}

.section-title {
  margin: 0 0 16px 0;
  font-size: 14px;
  font-weight: 600;
  text-transform: uppercase;
  letter-spacing: 0.5px;
}

.contact-details .contact-name,
.contact-details .company-name {
  margin: 0 0 6px 0;
  font-size: 16px;
  font-weight: 600;
}

.contact-details .person-name,
.contact-details .address,
.contact-details .email,
.contact-details .phone {
  margin: 2px 0;
  font-size: 14px;
  color: #333333;
}

.contact-details .address {
  margin: 8px 0;
}

.items-section {
  margin-bottom: 28px;
}

.items-table {
  width: 100%;
  border-collapse: separate;
  border-spacing: 0;
  border: 1px solid #d2d2d7;
  border-radius: 12px;
}

.items-table thead th {
  padding: 12px;
  text-align: left;
  font-size: 12px;
  font-weight: 600;
  background: #f5f5f7;
  border-bottom: 1px solid #d2d2d7;
}

.items-table th.qty,
.items-table th.rate,
.items-table th.amount {
  width: 100px;
  text-align: right;
}

.items-table tbody td {
  padding: 12px;
  vertical-align: top;
  border-bottom: 1px solid #f5f5f7;
}

.items-table tbody tr:last-child td {
  border-bottom: none;
}

.items-table tbody tr.even {
  background: #fbfbfd;
}

.items-table td.qty,
.items-table td.rate,
.items-table td.amount {
  text-align: right;
  font-variant-numeric: tabular-nums;
}

.summary-section {
  display: flex;
  justify-content: flex-end;
  margin-bottom: 24px;
}

.summary-table {
  min-width: 280px;
  padding: 18px;
  background: #f5f5f7;
  border-radius: 12px;
}

.summary-row {
  display: flex;
  justify-content: space-between;
  padding: 6px 0;
}

.summary-row .label {
  font-weight: 500;
  color: #666666;
}

.summary-row .value {
  font-weight: 600;
  text-align: right;
  font-variant-numeric: tabular-nums;
}

.summary-row .discount {
  color: #ff3b30;
}

.summary-row.total-row {
  margin-top: 8px;
  padding-top: 12px;
  border-top: 1px solid #d2d2d7;
  font-size: 16px;
}

.summary-row.total-row .value {
  font-size: 18px;
}

.notes,
.terms {
  margin-bottom: 20px;
  padding: 16px;
  background: #f5f5f7;
  border-radius: 12px;
}

.notes h4,
.terms h4 {
  margin: 0 0 8px 0;
  font-size: 15px;
}

.notes p,
.terms p {
  margin: 0;
  color: #333333;
}

.avoid-break {
  page-break-inside: avoid;
  break-inside: avoid;
}

@media print {
  body {
    background: #ffffff;
    padding: 0;
    font-size: 12px;
  }

  .invoice {
    width: 100%;
    max-width: none;
    padding: 15mm;
    border-radius: 0;
  }

  .top-header,
  .from-to-section {
    page-break-after: avoid;
  }

  .items-table thead {
    display: table-header-group;
  }

  .items-table tbody tr {
    page-break-inside: avoid;
    page-break-after: auto;
  }

  .items-table thead th,
  .summary-table,
  .notes,
  .terms {
    -webkit-print-color-adjust: exact;
    print-color-adjust: exact;
  }
}
"""

__all__ = ["INVOICE_CSS"]
