# Backend API paths (relative to settings.API_BASE_URL)

SHOWTIME_GET = '/showtimes.php'  # ?id=<showtime_id>
CONCESSION_LIST = '/concessions.php'
PROMOTION_LIST = '/promotions.php'
SEAT_OCCUPANCY_GET = '/seats.php'  # ?showtime_id=<showtime_id>
BOOKING_CREATE = '/bookings.php'
SESSION_PING = '/ping.php'

# Client page routes (handed to the navigator)

PAGE_SHOWTIMES = '/showtimes'
PAGE_LOGIN = '/login'
PAGE_BOOKINGS = '/bookings'
PAGE_BOOKINGS_SUCCESS = f'{PAGE_BOOKINGS}?success=true'
