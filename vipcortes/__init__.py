"""VipCortes barbershop backend: appointments, reviews, users and loyalty points."""
