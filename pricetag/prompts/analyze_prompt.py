TAX_RULES = """Tax calculation rules:
- For regions like Australia where GST is included in displayed prices, report $0 additional tax
- For other regions, apply the standard local sales tax rate
- Default to 0% if tax rate cannot be determined"""

RESULT_FORMAT = """Return only the data in this exact JSON format:
{{
  "detected_price": "{detected_price}",
  "original_currency": "local currency code",
  "converted_price": "amount in {currency}",
  "applicable_tax_rate": "tax rate percentage",
  "applicable_taxes": "tax amount in {currency}",
  "total_price_local": "original price plus tax in local currency",
  "total_price": "converted price plus tax in {currency}"
}}"""

MANUAL_ENTRY_TEMPLATE = """Please analyze this manually entered price and provide the following information:

Price entered: {price}
Target region: {region}
Target currency: {currency}

Please provide:
1. Determine the local currency used in {region}
2. Convert the price from the local currency to {currency} using current exchange rates
3. Calculate applicable sales tax for {region}

""" + TAX_RULES + "\n\n" + RESULT_FORMAT

IMAGE_ANALYSIS_TEMPLATE = """Please analyze this price tag image and provide the following information:

1. Extract the most prominent price shown in the image
2. Determine the local currency used in {region} and assume this is the correct currency for conversion
3. Convert the price to {currency}
4. Calculate applicable sales tax for {region}

""" + TAX_RULES + "\n\n" + RESULT_FORMAT
