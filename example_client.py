#!/usr/bin/env python3
"""
Example client for the Stocks API.
This script demonstrates how to interact with the Stocks API.
"""

import os
from typing import Any, Dict, List

import requests


class StocksClient:
    """Client for interacting with the Stocks API."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url

    def health_check(self) -> Dict[str, Any]:
        """Check if the API is running."""
        response = requests.get(f"{self.base_url}/")
        return response.json()

    def list_stocks(self) -> List[Dict[str, Any]]:
        """List every stock."""
        response = requests.get(f"{self.base_url}/stocks")
        return response.json()

    def get_stock(self, stock_id: str) -> Dict[str, Any]:
        """Fetch a single stock by ID."""
        response = requests.get(f"{self.base_url}/stocks/{stock_id}")
        return response.json()

    def create_stock(
        self, symbol: str, company_name: str, price: float
    ) -> Dict[str, Any]:
        """Create a stock."""
        data = {"symbol": symbol, "companyName": company_name, "price": price}
        response = requests.post(f"{self.base_url}/stocks", json=data)
        return response.json()

    def update_stock(
        self, stock_id: str, symbol: str, company_name: str, price: float
    ) -> Dict[str, Any]:
        """Replace the fields of an existing stock."""
        data = {"symbol": symbol, "companyName": company_name, "price": price}
        response = requests.put(f"{self.base_url}/stocks/{stock_id}", json=data)
        return response.json()

    def delete_stock(self, stock_id: str) -> bool:
        """Delete a stock. Returns True when the API confirms the deletion."""
        response = requests.delete(f"{self.base_url}/stocks/{stock_id}")
        return response.status_code == 200


def main():
    """Main function to demonstrate the Stocks API."""
    client = StocksClient(os.getenv("STOCKS_API_URL", "http://localhost:8000"))

    print("📈 Stocks API Client Demo")
    print("=" * 50)

    # Health check
    print("\n1. Checking API health...")
    try:
        health = client.health_check()
        print(f"✅ API Status: {health}")
    except requests.exceptions.ConnectionError:
        print(
            "❌ Could not connect to API. Make sure the server is running with: python run.py"
        )
        return

    # Create a stock
    print("\n2. Creating stock...")
    created = client.create_stock("SANB4", "Banco Santander", 45.2)
    if "id" not in created:
        print(f"❌ Create failed: {created}")
        return
    print(f"✅ Created: {created}")
    stock_id = created["id"]

    # Price must be positive
    print("\n3. Trying to create a stock with a zero price...")
    print(f"   Response: {client.create_stock('SANB4', 'Banco Santander', 0)}")

    # Update
    print("\n4. Updating stock...")
    print(f"✅ Updated: {client.update_stock(stock_id, 'SANB11', 'Santander Units', 30.1)}")

    # List
    print("\n5. Listing stocks...")
    for stock in client.list_stocks():
        print(f"   {stock['symbol']}: {stock['companyName']} @ {stock['price']}")

    # Clean up
    print("\n6. Cleaning up...")
    if client.delete_stock(stock_id):
        print(f"✅ Deleted: {stock_id}")

    print("\n🎉 Demo completed!")


if __name__ == "__main__":
    main()
